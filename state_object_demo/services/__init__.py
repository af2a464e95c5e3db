"""Models and background loading for the about info"""
