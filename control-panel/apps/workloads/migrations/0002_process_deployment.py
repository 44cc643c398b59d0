# Link deploying processes to the deployment rolling them out

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    dependencies = [
        ('workloads', '0001_initial'),
        ('deployments', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='process',
            name='deployment',
            field=models.ForeignKey(blank=True, help_text='Deployment rolling out this process, if any', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='processes', to='deployments.deployment'),
        ),
    ]
