"""Tempo Worklogs HTTP API"""
