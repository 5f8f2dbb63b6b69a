"""Employee Roster package.

A single page that lists employees and adds new ones, organized as a thin
Flask controller over service and repository layers.
"""
