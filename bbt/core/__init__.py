"""rating value types, errors and the base class shared by rating systems"""
