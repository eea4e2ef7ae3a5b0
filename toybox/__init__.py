"""toybox — two small console programs.

A number guessing game and a menu-driven calculator, packaged behind one
command-line entry point.

Usage:
    python -m toybox list    # Show programs
    python -m toybox guess   # Guess a number between 1 and 100
    python -m toybox calc    # Calculator with a text menu
"""
