"""Asset encoding: default elision rules, path derivation and encoders.

Submodules are imported explicitly; the domain types depend on
:mod:`respack.encoding.rules` for their defaults.
"""
