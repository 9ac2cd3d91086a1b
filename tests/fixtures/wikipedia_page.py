"""Trimmed copy of the Wikipedia prime ministers table for tests."""

PRIME_MINISTERS_HTML = """<!DOCTYPE html>
<html>
<head><title>List of prime ministers of India - Wikipedia</title></head>
<body>
<table class="infobox"><tr><th>Not this table</th></tr><tr><td>x</td></tr></table>
<table class="wikitable sortable">
<tr><th rowspan="2">No.</th><th rowspan="2">Portrait</th><th rowspan="2">Name<br/>(Birth–Death)<br/>Constituency</th><th colspan="2">Term of office</th><th rowspan="2">Party</th></tr>
<tr><th>Assumed office</th><th>Left office</th></tr>
<tr><th rowspan="2">1</th><td rowspan="2"></td><td rowspan="2"><b><a href="/wiki/Jawaharlal_Nehru">Jawaharlal Nehru</a></b><br/>(1889–1964)<br/>MP for Phulpur</td><td>15 August 1947</td><td>15 April 1952</td><td rowspan="2">Indian National Congress</td></tr>
<tr><td>15 April 1952</td><td>27 May 1964</td></tr>
<tr><th>–</th><td></td><td><b>Gulzarilal Nanda</b><sup class="reference">[a]</sup><br/>(1898–1998)<br/>MP for Sabarkantha</td><td>27 May 1964</td><td>9 June 1964</td><td>Indian National Congress</td></tr>
<tr><th>2</th><td></td><td><b>Lal Bahadur Shastri</b><br/>(1904–1966)<br/>MP for Allahabad</td><td>9 June 1964</td><td>11 January 1966</td><td>Indian National Congress</td></tr>
<tr><th>3</th><td></td><td><b>Indira Gandhi</b><br/>(1917–1984)<br/>MP for Rae Bareli</td><td>24 January 1966</td><td>24 March 1977</td><td>Indian National Congress</td></tr>
<tr><th>14</th><td></td><td><b>Manmohan Singh</b><br/>(1932–2024)<br/>Rajya Sabha MP for Assam</td><td>22 May 2004</td><td>26 May 2014</td><td>Indian National Congress</td></tr>
<tr><th>15</th><td></td><td><b>Narendra Modi</b><br/>(born 1950)<br/>MP for Varanasi</td><td>26 May 2014</td><td>Incumbent</td><td>Bharatiya Janata Party</td></tr>
<tr><td colspan="6"></td></tr>
</table>
<table class="wikitable"><tr><th>Deputy</th></tr><tr><td>Vallabhbhai Patel(1875–1950)</td></tr></table>
</body>
</html>
"""

# Records the table above yields with reference year 2024, by birth year
EXPECTED_RECORDS = [
    ("Jawaharlal Nehru", 1889, 1964, False, 75),
    ("Gulzarilal Nanda", 1898, 1998, False, 100),
    ("Lal Bahadur Shastri", 1904, 1966, False, 62),
    ("Indira Gandhi", 1917, 1984, False, 67),
    ("Manmohan Singh", 1932, 2024, False, 92),
    ("Narendra Modi", 1950, 2024, True, 74),
]

MALFORMED_ROW_HTML = PRIME_MINISTERS_HTML.replace(
    "<b>Indira Gandhi</b><br/>(1917–1984)", "<b>Indira Gandhi</b><br/>(unknown)"
)

NO_TABLE_HTML = "<html><body><p>Nothing to see</p></body></html>"
