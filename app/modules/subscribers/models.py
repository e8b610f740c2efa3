# Supabase table: email_subscribers

"""
email_subscribers:
- id: uuid (primary key)
- email: text (unique, not null)
- name: text (nullable)
- created_at: timestamp (default: now())
"""
