"""
Runtime services that drive the engine (timers).
"""
