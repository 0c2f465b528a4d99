# Supabase tables: groups, group_members
# This file documents the expected database schema
# Actual operations are handled via the shared query layer in service.py

"""
Expected Supabase table structure:

groups:
- id: uuid (primary key)
- client_id: uuid (foreign key to clients.id, not null, ON DELETE CASCADE)
- name: text (not null)
- description: text (nullable)
- target_id: uuid (foreign key to profiles.id, nullable, ON DELETE SET NULL) - person being rated in 360 flows
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())
- unique constraint on (client_id, name)

group_members:
- id: uuid (primary key)
- group_id: uuid (foreign key to groups.id, not null, ON DELETE CASCADE)
- profile_id: uuid (foreign key to profiles.id, not null, ON DELETE CASCADE)
- role: text (not null, default: 'member') - values: member, manager
- position: text (nullable) - free text job title / position label
- created_at: timestamp (default: now())
- unique constraint on (group_id, profile_id)

The legacy boolean `leader` column is not read or written; manager status is
carried by `role` only.
"""
