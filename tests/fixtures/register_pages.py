"""Gas Safe Register 결과 페이지 HTML 자산

실제 검색 결과 레이아웃(.search-results / .result-item)을 축약한 정적 HTML입니다.
"""

SINGLE_MATCH = """
<html><body>
<div class="search-results">
  <div class="result-item">
    <div class="gas-id">Gas Safe ID: 123456</div>
    <h3 class="business-name"> ABC Plumbing Services Ltd </h3>
    <p class="engineer-name">John Smith</p>
    <p class="address">123 High Street, London, SW1A 1AA</p>
    <p class="phone">020 1234 5678</p>
    <ul class="work-categories">
      <li>CCN1</li><li>CPA1</li><li>CENWAT</li><li>HTR1</li><li>WAT1</li>
    </ul>
    <p class="expiry-date">Expires: 31/12/2024</p>
  </div>
</div>
</body></html>
"""

TWO_VALID_ONE_MISSING_ID = """
<html><body>
<div class="search-results">
  <div class="result-item">
    <div class="gas-id">Gas Safe ID: 111111</div>
    <h3 class="business-name">North Heating</h3>
    <ul class="work-categories"><li>WAT1</li><li>CCN1</li></ul>
  </div>
  <div class="result-item">
    <h3 class="business-name">No Identifier Boilers</h3>
    <p class="engineer-name">Nobody</p>
  </div>
  <div class="result-item">
    <div class="gas-id">Gas Safe ID: 222222</div>
    <p class="engineer-name">Jane Doe</p>
    <p class="phone">  0161 000 0000  </p>
  </div>
</div>
</body></html>
"""

BLANK_ID = """
<html><body>
<div class="search-results">
  <div class="result-item">
    <div class="gas-id">Gas Safe ID:   </div>
    <h3 class="business-name">Blank Id Ltd</h3>
  </div>
</div>
</body></html>
"""

NO_RESULTS = """
<html><body>
<div class="no-results">No engineers found matching your search.</div>
</body></html>
"""

SEARCH_FORM = """
<html><body>
<form><input id="txtSearch" type="text"/><button id="btnSearch">Search</button></form>
</body></html>
"""

REGISTER_PAGES = {
    "single_match": SINGLE_MATCH,
    "two_valid_one_missing_id": TWO_VALID_ONE_MISSING_ID,
    "blank_id": BLANK_ID,
    "no_results": NO_RESULTS,
    "search_form": SEARCH_FORM,
}
