# Initial schema for apps, droplets, revisions, processes, routes and tasks

import apps.core.common.models
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('core', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='App',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('guid', models.CharField(default=apps.core.common.models.generate_guid, editable=False, max_length=255, unique=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(max_length=255)),
                ('lifecycle_type', models.CharField(choices=[('buildpack', 'Buildpack'), ('docker', 'Docker')], default='buildpack', max_length=20)),
                ('stack', models.CharField(default='cflinuxfs4', max_length=255)),
                ('environment_variables', models.JSONField(blank=True, default=dict)),
                ('space', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='apps', to='core.space')),
            ],
            options={
                'db_table': 'apps',
                'ordering': ['created_at', 'id'],
            },
        ),
        migrations.AddConstraint(
            model_name='app',
            constraint=models.UniqueConstraint(fields=('space', 'name'), name='unique_app_name_per_space'),
        ),
        migrations.CreateModel(
            name='Droplet',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('guid', models.CharField(default=apps.core.common.models.generate_guid, editable=False, max_length=255, unique=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('state', models.CharField(choices=[('STAGING', 'Staging'), ('STAGED', 'Staged'), ('FAILED', 'Failed'), ('EXPIRED', 'Expired')], default='STAGED', max_length=20)),
                ('sha256_checksum', models.CharField(blank=True, max_length=64, null=True)),
                ('droplet_hash', models.CharField(blank=True, max_length=40, null=True)),
                ('process_types', models.JSONField(blank=True, default=dict)),
                ('docker_image', models.CharField(blank=True, max_length=255)),
                ('execution_metadata', models.TextField(blank=True, default='')),
                ('app', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='droplets', to='workloads.app')),
            ],
            options={
                'db_table': 'droplets',
                'ordering': ['created_at', 'id'],
            },
        ),
        migrations.AddField(
            model_name='app',
            name='droplet',
            field=models.ForeignKey(blank=True, help_text='Current droplet the app runs', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to='workloads.droplet'),
        ),
        migrations.CreateModel(
            name='Revision',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('guid', models.CharField(default=apps.core.common.models.generate_guid, editable=False, max_length=255, unique=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('version', models.PositiveIntegerField()),
                ('description', models.CharField(blank=True, max_length=255)),
                ('app', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='revisions', to='workloads.app')),
                ('droplet', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='revisions', to='workloads.droplet')),
            ],
            options={
                'db_table': 'revisions',
                'ordering': ['created_at', 'id'],
            },
        ),
        migrations.AddConstraint(
            model_name='revision',
            constraint=models.UniqueConstraint(fields=('app', 'version'), name='unique_revision_version_per_app'),
        ),
        migrations.CreateModel(
            name='Route',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('guid', models.CharField(default=apps.core.common.models.generate_guid, editable=False, max_length=255, unique=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('host', models.CharField(max_length=255)),
                ('domain', models.CharField(default='apps.internal', max_length=255)),
                ('path', models.CharField(blank=True, max_length=255)),
                ('space', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='routes', to='core.space')),
            ],
            options={
                'db_table': 'routes',
                'ordering': ['created_at', 'id'],
            },
        ),
        migrations.CreateModel(
            name='Process',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('guid', models.CharField(default=apps.core.common.models.generate_guid, editable=False, max_length=255, unique=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('type', models.CharField(default='web', max_length=255)),
                ('role', models.CharField(blank=True, choices=[('WEB', 'Web'), ('WORKER', 'Worker'), ('DEPLOYING_WEB', 'Deploying web'), ('TASK', 'Task')], max_length=20)),
                ('state', models.CharField(choices=[('STARTED', 'Started'), ('STOPPED', 'Stopped')], default='STOPPED', max_length=20)),
                ('instances', models.PositiveIntegerField(default=1)),
                ('memory', models.PositiveIntegerField(default=1024, help_text='Memory quota in MB')),
                ('disk_quota', models.PositiveIntegerField(default=1024, help_text='Disk quota in MB')),
                ('file_descriptors', models.PositiveIntegerField(default=16384)),
                ('command', models.TextField(blank=True, null=True)),
                ('detected_buildpack', models.CharField(blank=True, max_length=255)),
                ('health_check_type', models.CharField(choices=[('port', 'Port'), ('process', 'Process'), ('http', 'HTTP')], default='port', max_length=20)),
                ('health_check_timeout', models.PositiveIntegerField(blank=True, null=True)),
                ('health_check_invocation_timeout', models.PositiveIntegerField(blank=True, null=True)),
                ('health_check_http_endpoint', models.CharField(blank=True, max_length=255, null=True)),
                ('enable_ssh', models.BooleanField(default=False)),
                ('ports', models.JSONField(blank=True, null=True)),
                ('metadata', models.JSONField(blank=True, default=dict)),
                ('app', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='processes', to='workloads.app')),
                ('revision', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='processes', to='workloads.revision')),
            ],
            options={
                'db_table': 'processes',
                'ordering': ['created_at', 'id'],
                'indexes': [
                    models.Index(fields=['app', 'type', 'created_at'], name='processes_app_type_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='RouteMapping',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('guid', models.CharField(default=apps.core.common.models.generate_guid, editable=False, max_length=255, unique=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('weight', models.PositiveIntegerField(blank=True, null=True)),
                ('app', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='route_mappings', to='workloads.app')),
                ('process', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='route_mappings', to='workloads.process')),
                ('route', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='route_mappings', to='workloads.route')),
            ],
            options={
                'db_table': 'route_mappings',
                'ordering': ['created_at', 'id'],
            },
        ),
        migrations.AddConstraint(
            model_name='routemapping',
            constraint=models.UniqueConstraint(fields=('route', 'process'), name='unique_route_per_process'),
        ),
        migrations.AddField(
            model_name='process',
            name='routes',
            field=models.ManyToManyField(related_name='processes', through='workloads.RouteMapping', to='workloads.route'),
        ),
        migrations.CreateModel(
            name='Task',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('guid', models.CharField(default=apps.core.common.models.generate_guid, editable=False, max_length=255, unique=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(max_length=255)),
                ('command', models.TextField()),
                ('state', models.CharField(choices=[('PENDING', 'Pending'), ('RUNNING', 'Running'), ('SUCCEEDED', 'Succeeded'), ('FAILED', 'Failed'), ('CANCELING', 'Canceling')], default='PENDING', max_length=20)),
                ('memory_in_mb', models.PositiveIntegerField(default=256)),
                ('disk_in_mb', models.PositiveIntegerField(default=1024)),
                ('environment_variables', models.JSONField(blank=True, default=dict)),
                ('app', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='tasks', to='workloads.app')),
                ('droplet', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='tasks', to='workloads.droplet')),
            ],
            options={
                'db_table': 'tasks',
                'ordering': ['created_at', 'id'],
            },
        ),
    ]
