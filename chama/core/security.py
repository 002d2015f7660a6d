from passlib.context import CryptContext

# pbkdf2 keeps hashing pure-python; admin passwords never leave the store in clear
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password):
    return pwd_context.hash(password)
