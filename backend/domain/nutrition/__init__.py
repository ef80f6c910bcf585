"""Nutrition targets domain: biometrics in, BMR/TDEE/calorie goal/macros out."""
