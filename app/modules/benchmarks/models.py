# Supabase table: benchmarks
# This file documents the expected database schema

"""
Expected Supabase table structure:

benchmarks:
- id: uuid (primary key)
- dimension_id: uuid (foreign key to dimensions.id, not null, ON DELETE CASCADE)
- industry_id: uuid (foreign key to industries.id, not null, ON DELETE CASCADE)
- value: decimal(10, 2) (not null)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())
- unique constraint on (dimension_id, industry_id)

A benchmark is the reference score of one assessment dimension within one
industry, used when comparing a participant's scores in reports.
"""
