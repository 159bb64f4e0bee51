"""
Test suite for the Interface Segregation demo.

Demonstrates testing patterns for capability-based designs:
- Domain logic tests (arithmetic, fixed action records)
- Design rule tests (types expose only the operations they support)
- Immutability verification
- An end-to-end check of the console driver
"""
