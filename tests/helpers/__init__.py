"""Shared test helpers"""
