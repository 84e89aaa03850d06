"""Price domain package.

Contains the immutable `Price` value with exact decimal arithmetic, the per-currency rounding
policy that turns exact amounts into payable ones, and the splitting of payable amounts into
parts that sum back exactly.
"""
