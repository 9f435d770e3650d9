"""Fingerprint extensions to the Funge-98 instruction set and their loader."""