"""Threading helpers"""
