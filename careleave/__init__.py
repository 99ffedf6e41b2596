"""
Family-Care Leave Subsidy Eligibility Service

Determines eligibility for the Navarra family-care leave subsidy across its
qualifying scenarios, checks compatibility with other public aid and picks
the best-paying option for an applicant.
"""

__version__ = "1.0.0"
__author__ = "Family Care Subsidy Team"
__description__ = "Rule-based eligibility engine for the family-care leave subsidy"
