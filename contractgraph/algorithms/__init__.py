"""Graph algorithms built on :meth:`Graph.collapse` and the traversals.

Importing a module registers its algorithm via
:func:`~contractgraph.algorithms.base.register`.
"""
