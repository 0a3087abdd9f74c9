"""
Lending Module

Loan sizing and timing rules: how many copies may go out at once and for how long.
"""
