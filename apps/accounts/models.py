from django.db import models
from django.utils.crypto import constant_time_compare


class UserManager(models.Manager):
    """Credential store for shop accounts keyed by username."""

    def get_by_username(self, username):
        return self.get(username=username)

    def create_user(self, username, password, email='', **extra_fields):
        if not username:
            raise ValueError('Username is required')

        extra_fields.setdefault('is_admin', False)
        user = self.model(username=username, password=password, email=email, **extra_fields)
        user.save(using=self._db)
        return user

    def create_admin(self, username, password, email=''):
        return self.create_user(username, password, email, is_admin=True)

    def verify_credential(self, username, candidate):
        """
        Check a login attempt against the stored credential.

        Passwords are stored as submitted and compared for exact equality,
        which keeps parity with the accounts created by the original shop.
        Swap this method (not the callers) to move to salted hashes.
        """
        if candidate is None:
            return False

        try:
            user = self.get_by_username(username)
        except self.model.DoesNotExist:
            return False

        return constant_time_compare(user.password, candidate)


class User(models.Model):
    """Shop customer or administrator."""

    username = models.CharField(max_length=150, unique=True)
    password = models.CharField(max_length=255)
    email = models.EmailField(max_length=255, blank=True)
    is_admin = models.BooleanField(default=False)

    objects = UserManager()

    class Meta:
        db_table = 'users'
        ordering = ['username']

    def __str__(self):
        return self.username

    # DRF checks these on request.user
    @property
    def is_authenticated(self):
        return True

    @property
    def is_anonymous(self):
        return False
