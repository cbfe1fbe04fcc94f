"""
Extraction and enumeration over smartctl JSON documents.

Import from the submodules directly:
- extractor: locate and validate the self-test subsection
- enumerator: reduce polling durations to an ordered list
"""
