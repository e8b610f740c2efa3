# Supabase tables: profiles, saved_posts
# Authentication is handled by Supabase Auth (auth.users table); a trigger
# creates the profiles row on sign-up.

"""
profiles:
- id: uuid (primary key, references auth.users.id)
- full_name: text (nullable)
- username: text (unique, nullable)
- bio: text (nullable)
- phone: text (nullable)
- avatar_url: text (nullable)
- date_of_birth: date (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)

saved_posts:
- id: uuid (primary key)
- user_id: uuid (references profiles.id)
- post_id: uuid (references posts.id)
- created_at: timestamp (default: now())
- unique (user_id, post_id)
"""
