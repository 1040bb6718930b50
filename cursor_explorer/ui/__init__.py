"""
Terminal-facing collaborators: prompts, progress bars and the terminal session
"""
