"""Nutrition domain: BMR, TDEE, macro and workout calorie calculations."""
