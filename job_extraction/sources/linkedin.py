"""LinkedIn job view source profile.

Job pages live at https://www.linkedin.com/jobs/view/<numeric id>. The search
UI instead keeps the selected job in ``?currentJobId=``. LinkedIn ships
several generations of the "unified top card" markup at once, so most fields
carry two or three selectors, newest first.
"""

from __future__ import annotations

import re

from .base import FieldLocators, SourceProfile


LINKEDIN = SourceProfile(
    name="linkedin",
    hostnames=("linkedin.com",),
    locators=FieldLocators(
        title=(
            'h1[data-test-id="job-title"]',
            ".job-details-jobs-unified-top-card__job-title h1",
            ".jobs-unified-top-card__job-title h1",
            "h1.top-card-layout__title",
        ),
        company_name=(
            ".job-details-jobs-unified-top-card__company-name a",
            ".jobs-unified-top-card__company-name a",
            ".jobs-unified-top-card__subtitle-primary-grouping .app-aware-link",
            ".topcard__org-name-link",
        ),
        company_link=(
            ".job-details-jobs-unified-top-card__company-name a",
            ".jobs-unified-top-card__company-name a",
            ".topcard__org-name-link",
        ),
        company_size=(".jobs-unified-top-card__subtitle-secondary-grouping",),
        company_industry=(".jobs-company__industry",),
        location=(
            ".jobs-unified-top-card__bullet",
            ".job-details-jobs-unified-top-card__primary-description-container .tvm__text",
            ".jobs-unified-top-card__primary-description-container",
            ".topcard__flavor--bullet",
        ),
        salary=(
            ".job-details-jobs-unified-top-card__job-insight--highlight",
            ".jobs-unified-top-card__job-insight--highlight",
            ".salary.compensation__salary",
        ),
        description=(
            ".jobs-description-content__text",
            ".job-details-description-content__text",
            ".show-more-less-html__markup",
        ),
        posted_date=(
            ".jobs-unified-top-card__subtitle-secondary-grouping time",
            ".posted-time-ago__text",
        ),
        job_type=(".jobs-unified-top-card__job-insight",),
        applicant_count=(
            ".jobs-unified-top-card__applicant-count",
            ".num-applicants__caption",
        ),
        experience_level=(".description__job-criteria-text",),
    ),
    job_id_patterns=(re.compile(r"/jobs/view/(\d+)"),),
    job_id_params=("currentJobId",),
    job_id_attributes=("data-job-id",),
)
