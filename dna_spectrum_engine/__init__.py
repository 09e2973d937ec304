"""
DNA Spectrum Engine

A deterministic scoring engine for the H2 DNA Spectrum instinct
self-assessment: 30 Likert responses in, archetype scores, a Dual State
profile and a canned interpretation out.
"""

__version__ = "1.0.0"
