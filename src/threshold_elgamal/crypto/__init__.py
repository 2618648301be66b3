"""Cryptographic primitives: arithmetic, secret sharing and ElGamal."""
