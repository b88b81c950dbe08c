"""
Location Tracking Module

Per-session home/away detection from device positions, with debounced
watering reminders on arrival and departure.
"""
