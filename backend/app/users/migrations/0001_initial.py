import app.users.models
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("is_superuser", models.BooleanField(default=False, help_text="Designates that this user has all permissions without explicitly assigning them.", verbose_name="superuser status")),
                ("email", models.EmailField(blank=True, max_length=254, verbose_name="email address")),
                ("is_staff", models.BooleanField(default=False, help_text="Designates whether the user can log into this admin site.", verbose_name="staff status")),
                ("is_active", models.BooleanField(default=True, help_text="Designates whether this user should be treated as active. Unselect this instead of deleting accounts.", verbose_name="active")),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                ("login_id", models.CharField(blank=True, max_length=20, null=True)),
                ("phone_number", models.CharField(max_length=11)),
                ("name", models.CharField(max_length=10)),
                ("gender", models.PositiveSmallIntegerField(choices=[(0, "Unspecified"), (1, "Male"), (2, "Female")], default=0)),
                ("provider", models.CharField(choices=[("local", "Local"), ("naver", "Naver"), ("kakao", "Kakao")], default="local", max_length=10)),
                ("sns_id", models.CharField(blank=True, max_length=255, null=True)),
                ("device_token", models.TextField(blank=True, null=True)),
                ("deleted_at", models.DateTimeField(blank=True, null=True)),
                ("groups", models.ManyToManyField(blank=True, help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.", related_name="user_set", related_query_name="user", to="auth.group", verbose_name="groups")),
                ("user_permissions", models.ManyToManyField(blank=True, help_text="Specific permissions for this user.", related_name="user_set", related_query_name="user", to="auth.permission", verbose_name="user permissions")),
            ],
            options={
                "constraints": [
                    models.UniqueConstraint(condition=models.Q(("deleted_at__isnull", True)), fields=("login_id",), name="uniq_login_id_if_alive"),
                    models.UniqueConstraint(condition=models.Q(("deleted_at__isnull", True)), fields=("phone_number",), name="uniq_phone_number_if_alive"),
                    models.UniqueConstraint(condition=models.Q(("deleted_at__isnull", True), ("sns_id__isnull", False)), fields=("provider", "sns_id"), name="uniq_provider_sns_id_if_alive"),
                    models.CheckConstraint(condition=models.Q(models.Q(("login_id__isnull", False), ("provider", "local")), models.Q(models.Q(("provider", "local"), _negated=True), ("login_id__isnull", True)), _connector="OR"), name="login_id_only_for_local"),
                ],
            },
            managers=[
                ("objects", app.users.models.UserManager()),
            ],
        ),
    ]
