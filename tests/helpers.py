from career_recommender.records import AttemptRecord, CatalogEntry, InterestRecord

SEEDED_CATALOG = [
    CatalogEntry(id="p-fs", name="Full Stack Development", slug="fullstack"),
    CatalogEntry(id="p-ds", name="Data Science & AI", slug="datascience"),
    CatalogEntry(id="p-cl", name="Cloud & DevOps", slug="cloud"),
    CatalogEntry(id="p-mo", name="Mobile Development", slug="mobile"),
    CatalogEntry(id="p-se", name="Cybersecurity", slug="security"),
]


class InMemoryStore:
    """Dict-backed stand-in for the persistence collaborator."""

    def __init__(self, attempts=None, responses=None, catalog=None):
        self.attempts = {} if attempts is None else attempts
        self.responses = {} if responses is None else responses
        self.catalog = list(SEEDED_CATALOG) if catalog is None else catalog
        self.catalog_reads = 0

    def fetch_question_attempts(self, user_id):
        return list(self.attempts.get(user_id, []))

    def fetch_interest_responses(self, user_id):
        return list(self.responses.get(user_id, []))

    def fetch_career_path_catalog(self):
        self.catalog_reads += 1
        return list(self.catalog)


def attempts(category, correct, wrong=0):
    return [AttemptRecord(category, True)] * correct + [AttemptRecord(category, False)] * wrong


def answer(question_id, response):
    return InterestRecord(question_id=question_id, response=response)
