# Supabase tables read here: profiles, user_roles, auth.users (via the auth admin API)
# Actual operations are handled via Supabase SDK in service.py

"""
The admin user list is assembled from:
- profiles: every registered user (see modules/profiles/models.py)
- user_roles: zero or more role rows per user; none means a plain 'user'
- auth.users: email addresses, readable only with the service_role key

Role integrity (one row per (user_id, role)) is enforced by the database.
"""
