"""Work Schedule package.

Calendar grid for the staff work-schedule screen, organized by feature
modules (grid, display, schedules) with a thin Flask controller layer over
plain service functions.
"""
