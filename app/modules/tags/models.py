# Supabase table: tags

"""
tags:
- id: uuid (primary key)
- name: text (unique, not null)
- slug: text (unique, not null)
- description: text (nullable)
- color: text (default: '#3b82f6')
- created_at: timestamp (default: now())

posts.tags stores tag names, not ids.
"""
