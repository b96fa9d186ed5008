"""
Generators — produce build descriptors from the manifest and VCS state.

Each module covers one step of the evaluation: revision resolution,
toolchain composition, the platform matrix, the two descriptor
builders, the overlay, and the registry that aggregates them.
"""
