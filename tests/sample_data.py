SAMPLE_RESUME = (
    "Jane Doe\n"
    "junior data analyst | jane.doe@example.com | +1 555 123 4567 | https://github.com/janedoe.\n"
    "Based in the Netherlands SUMMARY Analyst with experience in python and sql. "
    "EDUCATION BSc Computer Science at State University (2018-2022) "
    "EXPERIENCE Data Engineer at Acme Corp (2021-2023) • Built pipelines in pandas • Reduced latency by 30% "
    "PROJECTS Churn Model at Personal (2023) • Trained a classifier with sklearn "
    "SKILLS Python, SQL, Docker, Git"
)

SAMPLE_JD = "We need Python, SQL and Kubernetes. Experience with docker and numpy required."
