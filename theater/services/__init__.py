"""Application services layer: statement orchestration.

Services combine catalog lookup and pricing. They avoid UI concerns.
"""
