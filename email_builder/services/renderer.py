from typing import Optional

LAYOUT = """<!DOCTYPE html>
<html>
  <head>
    <title>{title}</title>
  </head>
  <body>
    <h1>{title}</h1>
    <p>{content}</p>
    <img src="{image}" alt="Image" style="width: 300px;" />
  </body>
</html>
"""

def render_template(title: Optional[str], content: Optional[str], image_url: Optional[str] = None) -> str:
    """
    Interpolates the template fields into the static download layout.
    Values are inserted verbatim (no HTML escaping); None renders as empty.
    """
    return LAYOUT.format(
        title=title or "",
        content=content or "",
        image=image_url or "",
    )
