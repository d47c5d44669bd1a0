"""
Gorillas - artillery duel simulation.

Two gorillas on a procedurally generated skyline lob bananas at each
other under wind and gravity.
"""

__version__ = "0.1.0"
