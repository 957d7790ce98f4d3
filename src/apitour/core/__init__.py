"""Core building blocks shared by every catalog.

    - runner: DemoEntry and the sequential demonstration runner
    - table: mapping with raw access and fallback resolution
    - varargs: explicit variadic argument sequences
    - protected: protected calls returning Ok/Err results
    - numeric: IEEE division and integer helpers
    - registry: built-in namespace and catalog discovery
"""
