"""Site Analyzer — fetch a page and report its on-page SEO signals."""
