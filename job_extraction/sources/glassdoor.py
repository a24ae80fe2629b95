"""Glassdoor job listing source profile.

Listing URLs look like
/job-listing/<slug>-JV_IC1147401_KO0,18_KE19,28.htm?jl=4567890 where ``jl``
is the listing id; some links use ``jobListingId`` instead.
"""

from __future__ import annotations

from .base import FieldLocators, SourceProfile


GLASSDOOR = SourceProfile(
    name="glassdoor",
    hostnames=("glassdoor.com",),
    locators=FieldLocators(
        title=(
            '[data-test="job-title"]',
            ".job-details-header h1",
        ),
        company_name=('[data-test="employer-name"]',),
        company_link=('[data-test="employer-name"] a',),
        company_size=('[data-test="employer-size"]',),
        company_industry=('[data-test="employer-industry"]',),
        location=(
            '[data-test="job-location"]',
            ".job-details-header .location",
        ),
        salary=(
            '[data-test="pay-range"]',
            ".salary-estimate",
        ),
        description=('[data-test="jobDescriptionContainer"]',),
        posted_date=('[data-test="job-age"]',),
        job_type=('[data-test="job-type"]',),
    ),
    job_id_params=("jl", "jobListingId"),
    job_id_attributes=("data-listing-id", "data-id"),
)
