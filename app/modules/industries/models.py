# Supabase table: industries

"""
Expected Supabase table structure:

industries:
- id: uuid (primary key)
- name: text (not null)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())

Referenced by profiles.industry_id (ON DELETE SET NULL) and
benchmarks.industry_id (ON DELETE CASCADE).
"""
