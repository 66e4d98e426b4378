"""
Console view API
"""
