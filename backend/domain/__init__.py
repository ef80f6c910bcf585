"""Domain layer for nutrition targets.

Business rules for turning user biometrics into daily calorie and macro
targets, decoupled from persistence and delivery.
"""
