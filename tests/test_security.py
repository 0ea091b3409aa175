from gerenciador_tarefas.core.security import get_password_hash, verify_password


def test_hash_is_salted_and_verifies():
    first = get_password_hash("s3cr3t")
    second = get_password_hash("s3cr3t")

    assert first != second
    assert "s3cr3t" not in first
    assert verify_password("s3cr3t", first)
    assert verify_password("s3cr3t", second)


def test_wrong_password_fails():
    hashed = get_password_hash("s3cr3t")

    assert not verify_password("S3cr3t", hashed)


def test_malformed_hash_fails_instead_of_raising():
    assert verify_password("s3cr3t", "not-a-bcrypt-hash") is False
