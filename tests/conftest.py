"""Shared fixtures and sample documents for the test suite."""

from __future__ import annotations

import pytest

SAMPLE_HTML_WITH_YALE = """\
<!DOCTYPE html>
<html>
<head>
  <title>Yale University Test Page</title>
  <link rel="stylesheet" href="/styles/main.css">
</head>
<body>
  <header>
    <h1>Welcome to Yale University</h1>
    <nav>
      <ul>
        <li><a href="https://www.yale.edu/about">About Yale</a></li>
        <li><a href="https://www.yale.edu/admissions">Admissions</a></li>
        <li><a href="/news">YALE news</a></li>
      </ul>
    </nav>
  </header>
  <main>
    <p>Yale University is a private Ivy League research university in New Haven, Connecticut.</p>
    <p>Founded in 1701, yale is the third-oldest institution of higher education in the United States.</p>
    <img src="https://www.yale.edu/images/logo.png" alt="Yale Logo">
    <div style="background-image: url('/images/campus.jpg')">Campus of Yale</div>
    <!-- Yale comment stays as is -->
    <script>var school = "Yale";</script>
  </main>
  <footer>
    <p>Contact us at <a href="mailto:info@yale.edu">info@yale.edu</a></p>
  </footer>
</body>
</html>
"""


@pytest.fixture()
def sample_html() -> str:
    return SAMPLE_HTML_WITH_YALE
