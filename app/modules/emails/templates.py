"""HTML bodies for transactional emails."""

from html import escape
from typing import Optional

WELCOME_SUBJECT = "Cảm ơn bạn đã đăng ký nhận email từ John Deus"

_PARAGRAPH = '<p style="color: #666; line-height: 1.6; margin-bottom: 15px;">{}</p>'


def render_welcome_email(name: Optional[str]) -> str:
    """Bilingual welcome body; a blank name reads "bạn" in Vietnamese and "friend" in English"""
    vi_name = escape(name) if name else "bạn"
    en_name = escape(name) if name else "friend"
    paragraphs_vi = [
        f"Cảm ơn {vi_name} vì đã đăng ký nhận email, Deus rất trân trọng bạn vì sự đồng hành, "
        f"Deus viết cho {vi_name} nhưng đôi khi cũng là viết cho chính mình.",
        "Những sự thẳng thắn, vì vốn dĩ thế giới này không hề dễ dàng.",
    ]
    paragraphs_en = [
        f"Hi {en_name},",
        f"Thank you {en_name} for signing up to receive emails, Deus really appreciates you for your companionship, "
        f"Deus writes for {en_name} but sometimes also writes for himself.",
        "Lights, because this world is inherently not easy.",
    ]
    return f"""
<div style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
  <h1 style="color: #333; margin-bottom: 20px;">Hi {vi_name},</h1>
  {"".join(_PARAGRAPH.format(p) for p in paragraphs_vi)}
  <hr style="border: none; border-top: 1px solid #eee; margin: 30px 0;">
  {"".join(_PARAGRAPH.format(p) for p in paragraphs_en)}
  <div style="margin-top: 30px; padding-top: 20px; border-top: 1px solid #eee; color: #999; font-size: 14px;">
    <p>Best regards,<br>John Deus</p>
  </div>
</div>
"""
