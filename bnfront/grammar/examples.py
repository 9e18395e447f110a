# bnfront/grammar/examples.py
"""`bnfc demo` 가 쓰는 내장 예제 문법 (사칙연산)"""

DEMO_GRAMMAR = """
Sum     -> Sum     [+-] Product | Product
Product -> Product [*/] Factor | Factor
Factor  -> '(' Sum ')' | Number
Number  -> [0-9] Number | [0-9]
"""
