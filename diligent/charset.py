"""Character sets used when generating random strings."""

ALPHA_UP = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHA_LO = "abcdefghijklmnopqrstuvwxyz"
NUM = "0123456789"
ALPHA_NUM = ALPHA_LO + ALPHA_UP + NUM