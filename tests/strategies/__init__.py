"""Hypothesis strategies for catalogtrans property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules. Strategies are organized by domain:

- templates: plural counts, conditions, variant texts and templates
- catalogue: locale codes, domain names, message ids and catalogues

Usage:
    from tests.strategies.templates import counts, variant_texts
    from tests.strategies.catalogue import catalogues, message_ids

Event-Emitting Strategies (HypoFuzz-Optimized):
    - counts: Emits count_type=int|float|decimal|str
    - catalogues: Emits catalogue_locales=N
"""
