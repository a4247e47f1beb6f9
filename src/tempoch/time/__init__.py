"""Time points on every supported scale, and periods over them.

Each scale is a :class:`.Time` subclass bound to one :class:`.TimeScale` marker. Civil conversion
and arithmetic dispatch through the scale descriptor table, cross-scale conversion through the
conversion graph, and :class:`.Period` stores its bounds as canonical MJD days.
"""
