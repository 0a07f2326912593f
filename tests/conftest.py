import pytest

CLEAN_PAGE = """<!DOCTYPE html>
<html lang="en">
<head><title>Clean</title></head>
<body>
  <nav><a href="/">Home</a></nav>
  <main>
    <h1>Title</h1>
    <h2>Section</h2>
    <img src="logo.png" alt="Company logo">
    <label for="email">Email</label>
    <input id="email" type="email">
  </main>
</body>
</html>
"""


@pytest.fixture
def clean_page():
    return CLEAN_PAGE
