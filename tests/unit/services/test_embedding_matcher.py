from access_sentinel.adapter.services.euclidean_embedding_matcher import EuclideanEmbeddingMatcher
from tests.fixtures.factories import make_account, make_admin


def test_distance_exactly_at_threshold_is_rejected():
    alice = make_account(face_embedding=[0.5, 0.0])

    assert EuclideanEmbeddingMatcher(0.5).match([0.0, 0.0], [alice]) is None


def test_distance_just_under_threshold_matches():
    alice = make_account(face_embedding=[0.499, 0.0])

    assert EuclideanEmbeddingMatcher(0.5).match([0.0, 0.0], [alice]) is alice


def test_global_minimum_wins_over_first_under_threshold():
    first = make_account(email="first@example.com", face_embedding=[0.45, 0.0])
    closest = make_account(email="closest@example.com", face_embedding=[0.05, 0.0])

    assert EuclideanEmbeddingMatcher(0.5).match([0.0, 0.0], [first, closest]) is closest


def test_ties_resolve_to_first_candidate():
    first = make_account(email="first@example.com", face_embedding=[0.1, 0.0])
    second = make_account(email="second@example.com", face_embedding=[0.0, 0.1])

    assert EuclideanEmbeddingMatcher(0.5).match([0.0, 0.0], [first, second]) is first


def test_ineligible_candidates_are_skipped():
    admin = make_admin(face_embedding=[0.0, 0.0])
    empty = make_account(email="empty@example.com", face_embedding=[])
    wrong_size = make_account(email="wrong@example.com", face_embedding=[0.0, 0.0, 0.0])

    assert EuclideanEmbeddingMatcher(0.5).match([0.0, 0.0], [admin, empty, wrong_size]) is None


def test_empty_probe_matches_nothing():
    alice = make_account(face_embedding=[0.0])

    assert EuclideanEmbeddingMatcher(0.5).match([], [alice]) is None
