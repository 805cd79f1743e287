"""
Harness components: environment verification, server launch and the mc
test sequence.
"""
