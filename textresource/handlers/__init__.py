"""Handler modules"""
