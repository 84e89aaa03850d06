"""Charge domain package.

A `Charge` is one named component of a total (e.g. shipping, tax, voucher); `Charges` is the
keyed collection of all components. Both delegate all numeric work to `Price`.
"""
