# Supabase table: comments

"""
comments:
- id: uuid (primary key)
- post_id: uuid (references posts.id, on delete cascade)
- user_id: uuid (references profiles.id)
- content: text (not null)
- created_at: timestamp (default: now())
"""
