"""Route and namespace extraction tests.

Test Modules:
- test_route_patterns.py: path()/re_path() declarations
- test_namespace_patterns.py: namespaced include() calls and key rewriting
- test_extraction_properties.py: Hypothesis properties of the extractor
"""
