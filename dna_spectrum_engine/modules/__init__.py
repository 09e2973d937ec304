"""
Modules package for the DNA Spectrum Engine.

Each module pairs a ``logic.py`` with its data contracts and exports its
public names from ``__init__``.

Available modules:
- catalog: The fixed 30-question table
- scoring: Per-archetype mean scores
- ranking: Primary and secondary archetype bands
- dual_state: Dominance/adaptiveness axes and profile type
- interpretation: Canned narrative per profile type
- reporting: PDF and HTML reports
"""
