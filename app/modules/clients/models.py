# Supabase table: clients
# This file documents the expected database schema
# Actual operations are handled via the shared query layer in service.py

"""
Expected Supabase table structure:

clients:
- id: uuid (primary key, default: gen_random_uuid())
- name: text (not null)
- address: text (nullable)
- logo: text (nullable) - storage path of the uploaded logo
- background: text (nullable) - storage path of the uploaded background
- primary_color: text (nullable)
- accent_color: text (nullable)
- require_profile: boolean (default: false)
- require_research: boolean (default: false)
- whitelabel: boolean (default: false)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())

A client owns zero or more profiles (profiles.client_id, ON DELETE SET NULL)
and groups (groups.client_id, ON DELETE CASCADE).
"""
