"""
Builder configuration module.

Frozen defaults for the draft and selector option lists, a YAML override
loader and validation of the merged configuration.
"""
