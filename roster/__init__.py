"""Puppy Bowl roster manager."""
