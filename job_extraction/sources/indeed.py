"""Indeed job view source profile.

Indeed addresses carry the job key as a query parameter: ``jk`` on
/viewjob pages and ``vjk`` when a job is opened from search results.
"""

from __future__ import annotations

from .base import FieldLocators, SourceProfile


INDEED = SourceProfile(
    name="indeed",
    hostnames=("indeed.com",),
    locators=FieldLocators(
        title=(
            'h1[data-testid="jobsearch-JobInfoHeader-title"]',
            ".jobsearch-JobInfoHeader-title",
        ),
        company_name=(
            '[data-testid="inlineHeader-companyName"] a',
            '[data-testid="inlineHeader-companyName"]',
            ".jobsearch-InlineCompanyRating .css-1ioi40n",
        ),
        company_link=('[data-testid="inlineHeader-companyName"] a',),
        company_size=('[data-testid="inlineHeader-companyName"] + div',),
        company_industry=(".jobsearch-CompanyInfoWithoutHeaderImage .css-1w0iwyp",),
        location=(
            '[data-testid="job-location"]',
            '[data-testid="inlineHeader-companyLocation"]',
            ".jobsearch-JobInfoHeader-subtitle div",
        ),
        salary=(
            ".salary-snippet",
            '[data-testid="job-salary"]',
            "#salaryInfoAndJobType span",
            ".jobsearch-JobMetadataHeader-item",
        ),
        description=("#jobDescriptionText",),
        posted_date=(
            ".jobsearch-JobMetadataFooter .date",
            '[data-testid="myJobsStateDate"]',
        ),
        job_type=('[data-testid="job-type-label"]',),
        applicant_count=(".jobsearch-JobMetadataHeader-item",),
    ),
    job_id_params=("jk", "vjk"),
    job_id_attributes=("data-jk",),
)
