"""
Shared fixtures: a fixed reference time, an engine, and small job pages in
the markup each board uses.
"""

from datetime import datetime, timezone

import pytest

from job_extraction import ExtractionEngine, HtmlDocument


NOW = datetime(2024, 3, 31, 12, 0, tzinfo=timezone.utc)


INDEED_URL = "https://www.indeed.com/viewjob?jk=abc123def456"
INDEED_HTML = """
<html>
<body>
  <div class="jobsearch-JobInfoHeader">
    <h1 data-testid="jobsearch-JobInfoHeader-title">Senior Software Engineer</h1>
    <div data-testid="inlineHeader-companyName"><a href="/cmp/tech-innovations">Tech Innovations Inc</a></div>
    <div class="company-size">1,001-5,000 employees</div>
    <div data-testid="job-location">San Francisco, CA</div>
    <div data-testid="job-salary">$80,000 - $120,000 a year</div>
    <span data-testid="job-type-label">Full-time</span>
  </div>
  <div id="jobDescriptionText">
    <p>We are looking for a Python developer with AWS and Docker experience.</p>
    <ul><li>5+ years building web services</li></ul>
  </div>
  <div class="jobsearch-JobMetadataFooter"><span class="date">Posted 2 days ago</span></div>
</body>
</html>
"""


LINKEDIN_URL = "https://www.linkedin.com/jobs/view/3456789/"
LINKEDIN_HTML = """
<html>
<body>
  <div class="job-details-jobs-unified-top-card__job-title"><h1>Frontend Developer</h1></div>
  <div class="job-details-jobs-unified-top-card__company-name">
    <a href="https://www.linkedin.com/company/acme-corp/life">Acme Corp</a>
  </div>
  <div class="job-details-jobs-unified-top-card__primary-description-container">
    <span class="tvm__text">New York, NY (Hybrid)</span>
  </div>
  <div class="job-details-jobs-unified-top-card__job-insight--highlight">$50K/yr - $70K/yr</div>
  <span class="jobs-unified-top-card__applicant-count">142 applicants</span>
  <span class="posted-time-ago__text">1 week ago</span>
  <div class="jobs-description-content__text">Build UIs with React and TypeScript.</div>
</body>
</html>
"""


GLASSDOOR_URL = (
    "https://www.glassdoor.com/job-listing/data-engineer-dataco-JV_IC1147401_KO0,13_KE14,20.htm?jl=4567890"
)
GLASSDOOR_HTML = """
<html>
<body>
  <div class="job-details-header">
    <div data-test="job-title">Data Engineer</div>
    <div data-test="employer-name"><a href="/Overview/Working-at-DataCo.htm">DataCo</a></div>
    <div data-test="job-location">Remote</div>
    <div data-test="pay-range">$90K - $110K (Employer estimate)</div>
    <div data-test="job-age">2 months ago</div>
  </div>
  <div data-test="jobDescriptionContainer">Pipelines in <b>SQL</b> and Kubernetes.</div>
</body>
</html>
"""


LINKEDIN_SEARCH_URL = "https://www.linkedin.com/jobs/search/?keywords=engineer"
LINKEDIN_SEARCH_HTML = """
<html>
<body>
  <ul class="jobs-search__results-list">
    <li class="job-card" data-job-id="111">
      <h1 data-test-id="job-title">Backend Engineer</h1>
      <div class="jobs-unified-top-card__company-name"><a href="/company/alpha">Alpha Inc</a></div>
      <span class="jobs-unified-top-card__bullet">Austin, TX</span>
    </li>
    <li class="job-card" data-job-id="222">
      <h1 data-test-id="job-title">Platform Engineer</h1>
      <div class="jobs-unified-top-card__company-name"><a href="/company/beta">Beta LLC</a></div>
      <span class="jobs-unified-top-card__bullet">Remote</span>
    </li>
  </ul>
</body>
</html>
"""


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def engine():
    return ExtractionEngine()


@pytest.fixture
def indeed_doc():
    return HtmlDocument.from_html(INDEED_HTML, address=INDEED_URL)


@pytest.fixture
def linkedin_doc():
    return HtmlDocument.from_html(LINKEDIN_HTML, address=LINKEDIN_URL)


@pytest.fixture
def glassdoor_doc():
    return HtmlDocument.from_html(GLASSDOOR_HTML, address=GLASSDOOR_URL)


@pytest.fixture
def linkedin_search_doc():
    return HtmlDocument.from_html(LINKEDIN_SEARCH_HTML, address=LINKEDIN_SEARCH_URL)
