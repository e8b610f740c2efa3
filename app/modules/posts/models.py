# Supabase table: posts
# Actual operations are handled via Supabase SDK in service.py

"""
posts:
- id: uuid (primary key)
- title: text (not null)
- content: text (not null)
- excerpt: text (nullable)
- featured_image: text (nullable) - public URL in the blog-images bucket
- author_id: uuid (references profiles.id)
- published: boolean (default: false)
- tags: text[] - tag names
- reading_time: integer (nullable) - minutes
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)

Author names come from profiles (full_name, username); there is no FK
embedding configured, so services join in Python.
"""
