"""
Email bodies.

Dependencies: None
System role: Transactional email content
"""

from html import escape


def password_reset_email(reset_url: str, host: str, email: str) -> tuple[str, str, str]:
    """
    Render the password reset email.

    Returns:
        tuple: (subject, html, text)
    """
    subject = f"Reset your password - {host}"
    safe_url = escape(reset_url, quote=True)
    html = f"""\
<body style="background:#f9f9f9;font-family:Helvetica,Arial,sans-serif;">
  <table width="100%" border="0" cellspacing="20" cellpadding="0"
         style="background:#fff;max-width:600px;margin:auto;border-radius:10px;">
    <tr><td align="center" style="font-size:22px;color:#444;">
      Reset the password for <strong>{escape(email)}</strong> on <strong>{escape(host)}</strong>
    </td></tr>
    <tr><td align="center">
      <a href="{safe_url}" target="_blank"
         style="font-size:18px;color:#fff;background:#346df1;text-decoration:none;
                border-radius:5px;padding:10px 20px;display:inline-block;font-weight:bold;">
        Reset password
      </a>
    </td></tr>
    <tr><td align="center" style="font-size:16px;color:#444;">
      This link expires in 1 hour. If you did not request a reset you can ignore this email.
    </td></tr>
  </table>
</body>"""
    text = (
        f"Reset the password for {email} on {host}\n\n"
        f"{reset_url}\n\n"
        "This link expires in 1 hour. If you did not request a reset you can ignore this email.\n"
    )
    return subject, html, text
