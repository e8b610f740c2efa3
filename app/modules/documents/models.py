# Supabase table: documents
# Files live in the blog-images bucket under the documents/ prefix

"""
documents:
- id: uuid (primary key)
- title: text (not null)
- description: text (nullable)
- file_url: text (public URL)
- file_type: text - MIME type, or the file extension when the upload had none
- html_content: text (nullable) - inline viewer content; file_url is the fallback
- category: text (default: 'general')
- is_pinned: boolean (default: false)
- created_by: uuid (references profiles.id)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)
"""
