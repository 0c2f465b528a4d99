# Supabase tables: profiles, auth.users
# This file documents the expected database schema
# Actual operations are handled via the shared query layer in service.py
# Authentication is handled by Supabase Auth (auth.users table)

"""
Expected Supabase table structure:

profiles:
- id: uuid (primary key)
- auth_user_id: uuid (unique, references auth.users.id, nullable until the invite is claimed)
- username: text (unique, not null)
- name: text (not null)
- email: text (unique, not null)
- client_id: uuid (foreign key to clients.id, ON DELETE SET NULL, nullable)
- industry_id: uuid (foreign key to industries.id, ON DELETE SET NULL, nullable)
- language_id: uuid (foreign key to languages.id, nullable)
- last_login_at: timestamp (nullable)
- completed_profile: boolean (default: false)
- accepted_terms: boolean (nullable)
- accepted_at: timestamp (nullable)
- accepted_signature: text (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())

Note: a profile belongs to at most one client and one industry at a time.
Credentials live in auth.users; this table only holds application data.
"""
