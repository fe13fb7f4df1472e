"""Calendar and horizon conventions used by the ROI core.

The working-day and month conventions are deliberately separate: payback is
measured in working days, monthly figures divide the year by twelve.
"""

WORKING_DAYS_PER_YEAR = 260
MONTHS_PER_YEAR = 12
MINUTES_PER_HOUR = 60
PROJECTION_HORIZON_MONTHS = 12
