"""Raw storage backends for setting values.

A store reads, writes and deletes raw values by key. Reading a key that
was never written returns UNDEFINED.
"""
