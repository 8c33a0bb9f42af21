"""
GrubDash — dishes & orders API
"""
