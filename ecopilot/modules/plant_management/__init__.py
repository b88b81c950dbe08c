"""
Plant Management Module

Houseplant collection with bilingual names, watering schedules and
derived watering state.
"""
