"""
Render collaborators for Gorillas.
"""
