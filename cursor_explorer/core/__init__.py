"""
Core browsing components: listing, selection parsing and the navigation loop
"""
