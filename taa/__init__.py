"""
TAA: Teaching Assistant Assistant

A command-line assistant for teaching staff to manage modules, teaching
classes, enrolled students, graded assessments and the marks obtained in them.
"""

__version__ = "1.0.0"
__author__ = "TAA Development Team"
__description__ = "Command-line assistant for managing classes, students and assessments"
