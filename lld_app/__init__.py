"""
LLD App - Design Pattern Lessons

A collection of small, self-contained low-level design lessons. Each
subpackage teaches one object-oriented pattern through a toy domain:
robots with swappable behaviours, a burger factory, an ATM note dispenser,
a file-system composite, a payment gateway and a document editor.
"""

__version__ = "0.1.0"
__author__ = "LLD Team"
