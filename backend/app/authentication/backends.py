# app/authentication/backends.py
from django.contrib.auth import get_user_model
from django.contrib.auth.backends import ModelBackend


class LoginIdBackend(ModelBackend):
    """탈퇴하지 않은 로컬 계정만 login_id + 비밀번호로 인증"""

    def authenticate(self, request, login_id=None, password=None, **kwargs):
        UserModel = get_user_model()
        if login_id is None:
            login_id = kwargs.get(UserModel.USERNAME_FIELD)
        if login_id is None or password is None:
            return None

        user = UserModel.objects.find_by_login_id(login_id)
        if user is None:
            # 존재하지 않는 아이디도 해시 한 번 돌려서 응답 시간 차이 줄임
            UserModel().set_password(password)
            return None

        if user.check_password(password) and self.user_can_authenticate(user):
            return user
        return None

    def user_can_authenticate(self, user):
        return super().user_can_authenticate(user) and user.deleted_at is None
