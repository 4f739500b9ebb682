"""Tkinter windows: the main window and one form page per table."""