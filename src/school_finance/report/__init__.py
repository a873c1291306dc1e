"""Report-facing derivations built on top of the aggregate.

`insights` adds the secondary dashboard figures (coverage, classifications,
season-over-season change); `summary` prepares the flattened text handed to
the external report writer.
"""
