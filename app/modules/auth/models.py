# Supabase Auth
# This module uses Supabase's built-in authentication system.
# Roles live in the public.user_roles table.

"""
Supabase Auth provides:
- auth.sign_up() - Register new users
- auth.sign_in_with_password() - Authenticate users
- auth.get_user() - Get current user from JWT token
- auth.sign_out() - Logout users

user_roles:
- id: uuid (primary key)
- user_id: uuid (references auth.users.id)
- role: app_role enum ('admin' | 'user')
- created_at: timestamp (default: now())
- unique (user_id, role)
"""
