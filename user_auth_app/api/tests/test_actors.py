from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser
from django.test import RequestFactory, TestCase

from profiles.models import Profile
from user_auth_app.actors import Actor, actor_for, get_actor

User = get_user_model()


class ActorResolutionTests(TestCase):
    def test_profile_type_becomes_role(self):
        user = User.objects.create_user("ana", "ana@example.com", "pass1234")
        Profile.objects.create(user=user, type=Profile.Type.ARTISAN)
        self.assertEqual(actor_for(user), Actor.artisan(user.id))

    def test_staff_without_profile_is_admin(self):
        user = User.objects.create_user("root", "root@example.com", "pass1234", is_staff=True)
        actor = actor_for(user)
        self.assertTrue(actor.is_admin)

    def test_user_without_role_has_no_actor(self):
        user = User.objects.create_user("plain", "plain@example.com", "pass1234")
        self.assertIsNone(actor_for(user))
        self.assertIsNone(actor_for(AnonymousUser()))

    def test_actor_is_cached_per_request(self):
        user = User.objects.create_user("cust", "cust@example.com", "pass1234")
        Profile.objects.create(user=user, type=Profile.Type.CUSTOMER)
        request = RequestFactory().get("/")
        request.user = user
        first = get_actor(request)
        user.profile.type = Profile.Type.ARTISAN
        self.assertIs(get_actor(request), first)
        self.assertEqual(str(first), f"customer:{user.id}")
