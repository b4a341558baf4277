"""
Models Module
=============

This module contains implementations of rating systems which update the skill beliefs of players
grouped into ranked teams after a single match.

Included Rating Systems:
- Weng-Lin Bradley-Terry: A Bayesian online rating system using the Bradley-Terry (logistic) model,
  comparing every team against every other team in the match.

Each rating system is implemented as a class holding only its configuration, so a single instance
can be reused across any number of independent matches.
"""
