"""
UI package - thin pygame adapters around the gameplay core.
"""
