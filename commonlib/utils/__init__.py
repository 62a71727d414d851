# Utility package for commonlib
"""
Stateless helpers used by the containers and exposed to callers.

Modules:
    array_utils     - duplicate removal and membership on plain lists
    convert_utils   - readable string conversion
    extend_utils    - shallow/deep merge and public-attribute copy
    function_utils  - binding a receiver to a function
    judge_utils     - type-judging predicates
    path_utils      - POSIX path string transforms
"""
