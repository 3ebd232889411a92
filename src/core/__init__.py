"""
Core domain models and calendar arithmetic.

This module contains the pure building blocks (units, calendar enums,
date advancer, time-of-day decomposer) that are independent of the
system clock.
"""
