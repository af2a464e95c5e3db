"""User interface: main window, about page and theme"""
